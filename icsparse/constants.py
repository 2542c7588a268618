import re

# a property line is an uppercase key, a colon and a value made of word chars / blanks.
# anything else on the line (punctuation, ';' parameters, '\r') ends the value.
PROPERTY_RE = re.compile(r"^([A-Z-]+):([\w \t\v\f]*)", re.MULTILINE)

BEGIN = "BEGIN"
END = "END"

VCALENDAR = "VCALENDAR"
VTIMEZONE = "VTIMEZONE"
VEVENT = "VEVENT"

# property key -> record attribute
CALENDAR_PROPERTIES = {
    "METHOD": "method",
    "PRODID": "prodid",
    "VERSION": "version",
}

EVENT_PROPERTIES = {
    "UID": "uid",
    "SUMMARY": "summary",
    "SEQUENCE": "sequence",
    "DTSTAMP": "dtstamp",
    "LOCATION": "location",
    "CATEGORIES": "categories",
    "DESCRIPTION": "description",
    "CLASS": "class_",
}

TIMEZONE_PROPERTIES = {
    "TZID": "tzid",
}

TIMEZONE_RULE_PROPERTIES = {
    "TZOFFSETFROM": "offset_from",
    "TZOFFSETTO": "offset_to",
    "TZNAME": "name",
    "DTSTART": "dtstart",
    "RRULE": "rrule",
}

USER_AGENT = 'Mozilla/5.0 (X11; Linux x86_64) icsparse/1.0'
