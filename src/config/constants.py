# Constants
DEFAULT_WEBHOOK_URL = "https://script.google.com/macros/s/AKfycbyHm-EjXQWoXSExo7_PZDPBT0XBgSprwg1v9sW4NmHrWmSCLEpepf7WlfuenOPE2NPQ/exec"
DEFAULT_LOG_LEVEL = "DEBUG"

# Environment variable names
WEBHOOK_URL_ENV = "RELAY_WEBHOOK_URL"
TIMEOUT_SECONDS_ENV = "RELAY_TIMEOUT_SECONDS"
LOG_LEVEL_ENV = "RELAY_LOG_LEVEL"

# CORS headers attached to every response
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type, X-Requested-With",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

