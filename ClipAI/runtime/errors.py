_MAP = {
    "missing_api_key": "Please configure an API key for the selected AI profile.",
    "invalid_endpoint": "The AI endpoint URL is invalid.",
    "http_error": "The AI service returned an HTTP error.",
    "empty_response": "Could not parse any text or image from the AI response.",
    "connect_failed": "Connection to the AI service failed.",
    "request_in_flight": "A request is already running.",
    "empty_working_set": "Nothing has been collected yet.",
    "persistence_read_failed": "Saved data could not be read; starting empty.",
    "persistence_write_failed": "Saving data failed.",
    "image_write_failed": "The copied image could not be saved.",
    "file_read_failed": "A collected file could not be read.",
    "execution_failed": "The AI request failed unexpectedly.",
}


def humanize(error_code, details=""):
    code = str(error_code or "").strip()
    msg = _MAP.get(code, "An unexpected error occurred.")
    if details:
        return f"{msg} ({details})"
    return msg
