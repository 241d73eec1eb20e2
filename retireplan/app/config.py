"""Default application configuration.

Any key can be overridden from the environment with the RETIREPLAN_ prefix,
e.g. RETIREPLAN_LOG_LEVEL=DEBUG or
RETIREPLAN_CORS_ORIGINS='["https://plan.example.com"]' (values are parsed as JSON).
"""


class DefaultConfig:
    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]
    LOG_LEVEL = "INFO"
