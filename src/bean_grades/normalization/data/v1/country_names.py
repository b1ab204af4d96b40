# Dataset spelling -> region name in the world boundary map.
COUNTRY_NAMES = {
    "United States": "USA",
    "United States (Hawaii)": "USA",
    "United States (Puerto Rico)": "Puerto Rico",
    "Tanzania, United Republic Of": "Tanzania",
    "Cote d?Ivoire": "Ivory Coast",
    "Cote d'Ivoire": "Ivory Coast",
    "Côte d'Ivoire": "Ivory Coast",
    "Congo, Dem. Rep.": "Democratic Republic of the Congo",
    "Lao People's Democratic Republic": "Laos",
    "Viet Nam": "Vietnam",
    "United Kingdom": "UK",
}
