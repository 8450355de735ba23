DEFAULTS = {
    # Service name used in logs and the OpenAPI title
    "APP_NAME": "flightpath-api",
    # Prefix mounted in front of every route
    "API_PREFIX": "",
    # Bind address for the server command
    "HOST": "0.0.0.0",
    # Listen port for the server command
    "PORT": 8080,
    # Upper bound for one /calculate request in milliseconds (0 = no limit)
    "REQUEST_TIMEOUT_MS": 10000,
    # Root log level
    "LOG_LEVEL": "INFO",
    # logging.Formatter format string
    "LOG_FORMAT": "%(asctime)s %(levelname)s %(name)s %(message)s",
    # CORS: origins allowed to call the API
    "CORS_ALLOWED_ORIGINS": ["*"],
    # CORS: allowed methods
    "CORS_ALLOWED_METHODS": ["GET", "OPTIONS"],
    # CORS: allowed request headers
    "CORS_ALLOWED_HEADERS": ["Accept", "Content-Type"],
    # CORS: response headers exposed to the browser
    "CORS_EXPOSED_HEADERS": [],
    # CORS: allow cookies / auth headers
    "CORS_ALLOW_CREDENTIALS": False,
    # CORS: preflight cache lifetime in seconds
    "CORS_MAX_AGE": 300,
}
