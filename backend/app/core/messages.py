"""User-facing texts for the message keys carried by response envelopes."""

RESPONSE_MESSAGES: dict[str, str] = {
    "SOMETHING_WRONG": "Something went wrong. Please try again later.",
    "INVALID_IMAGE_FORMAT": "Only jpg, jpeg and png images are allowed.",
    "IMAGE_TOO_LARGE": "Image exceeds the maximum allowed size.",
    "INVALID_CONTENT_LENGTH": "Invalid Content-Length header.",
    "TOO_MANY_REQUESTS": "Too many requests. Please try again later.",
    # Countries
    "COUNTRY_ALREADY_EXISTS": "Country already exists.",
    "COUNTRY_NOT_PRESENT": "Country is not present.",
    "COUNTRY_CREATED_SUCCESSFULLY": "Country created successfully.",
    "COUNTRY_CREATION_FAILED": "Failed to create country.",
    "COUNTRY_FOUND": "Countries found.",
    "NO_COUNTRY_FOUND": "No country found.",
    # States
    "STATE_CREATED_SUCCESSFULLY": "State created successfully.",
    "STATE_CREATION_FAILED": "Failed to create state.",
    "STATES_ARE_PRESENT": "States found.",
    "NO_STATE_PRESENT": "No state present.",
    "STATE_NOT_FOUND_OR_NOT_IN_COUNTRY": "State not found for the given country.",
    # Cities
    "CITY_CREATED_SUCCESSFULLY": "City created successfully.",
    "CITY_CREATION_FAILED": "Failed to create city.",
    "CITIES_FOUND": "Cities found.",
    "NO_CITIES_PRESENT": "No cities present.",
    # Categories
    "CATEGORY_ALREADY_EXISTS": "Category already exists.",
    "CATEGORY_CREATED_SUCCESSFULLY": "Category created successfully.",
    "CATEGORY_CREATION_FAILED": "Failed to create category.",
    "CATEGORY_FOUND": "Categories found.",
    "CATEGORY_NOT_FOUND": "Category not found.",
    # Subcategories
    "SUBCATEGORY_CREATED_SUCCESSFULLY": "Subcategory created successfully.",
    "SUBCATEGORY_CREATION_FAILED": "Failed to create subcategory.",
    "SUBCATEGORIES_FOUND": "Subcategories found.",
    "NO_SUBCATEGORY_PRESENT": "No subcategory present.",
    "SUBCATEGORY_NOT_FOUND": "Subcategory not found.",
    "SUBCATEGORY_DELETED_SUCCESSFULLY": "Subcategory deleted successfully.",
    "SUBCATEGORY_DELETION_FAILED": "Failed to delete subcategory.",
}


def get_response_message(key: str) -> str:
    """Return the text for ``key``; unknown keys are echoed back unchanged."""

    return RESPONSE_MESSAGES.get(key, key)
