"""Default values for the rain alert policy and delivery settings."""

# Hours ahead of "now" (in the forecast's timezone) where the window opens.
DEFAULT_LOOKAHEAD_OFFSET_HOURS = 9
# Length of the window in hours.
DEFAULT_WINDOW_HOURS = 13
# Minimum precipitation probability (0-1) that counts as rain. Inclusive.
DEFAULT_RAIN_THRESHOLD = 0.3

DEFAULT_EXCLUDE: tuple[str, ...] = ("currently", "minutely", "daily", "alerts", "flags")

DEFAULT_EMAIL_FROM = "weather@yangmillstheory.com"
EMAIL_SUBJECT = "It might rain soon!"
ATTACHMENT_FILENAME = "data.json"

# Checked in this order; the first missing one is reported.
REQUIRED_ENV_VARS: tuple[str, ...] = (
    "API_URL",
    "API_KEY",
    "LAT",
    "LNG",
    "TOPIC_ARN",
    "EMAIL_TO",
)
