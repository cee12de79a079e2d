"""Constants for Owner model field names"""


class OwnerFields:
    """Field name constants for Owner model"""
    ID = "id"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    ADDRESS = "address"
    CITY = "city"
    TELEPHONE = "telephone"
