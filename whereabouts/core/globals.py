"""Global variables."""

OPENAPI_TAGS = [
    {
        "name": "Locations",
        "description": (
            "Facility locations, the residents currently at them"
            " and the tag scans recorded there"
        ),
    },
    {
        "name": "Health",
        "description": "Application health check endpoints",
    },
]
