"""User-facing result messages.

Translation is left to the transport layer; these are the default
English texts.
"""

RESOURCE_NAME = "Category"


def created_message(resource: str = RESOURCE_NAME) -> str:
    return f"{resource} was created successfully."


def updated_message(resource: str = RESOURCE_NAME) -> str:
    return f"{resource} was updated successfully."


def deleted_message(resource: str = RESOURCE_NAME) -> str:
    return f"{resource} was deleted successfully."


def not_found_message(resource_id: int, resource: str = RESOURCE_NAME) -> str:
    return f"{resource} {resource_id} was not found."


def id_mismatch_message(path_id: int, body_id: int) -> str:
    return f"Route id {path_id} does not match body id {body_id}."
