"""
Central place for the HubSpot CRM endpoints and setting names
the form workflow talks to.

Paths are relative to HUBSPOT_BASE_URL, which pins the API version.
"""

# Name the host configuration stores the HubSpot API key under.
API_KEY_SETTING = "HubSpotApiKey"

# Query parameter HubSpot reads the API key from.
API_KEY_PARAM = "hapikey"

CONTACT_PROPERTIES_PATH = "properties/contacts"
CONTACTS_PATH = "objects/contacts"
