"""Constants for Pet model field names"""


class PetFields:
    """Field name constants for Pet model"""
    ID = "id"
    NAME = "name"
    TYPE = "type"
    BIRTH_DATE = "birth_date"
    OWNER_ID = "owner_id"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
