REQUEST_TIMEOUT = 30
USER_AGENT = "DiscourseBadgeClient/1.0"

# Environment variables read by ClientConfig.from_env
ENV_HOST = "DISCOURSE_HOST"
ENV_API_USERNAME = "DISCOURSE_API_USERNAME"
ENV_API_KEY = "DISCOURSE_API_KEY"
ENV_TIMEOUT = "DISCOURSE_TIMEOUT"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Discourse answers with this status on every successful call we make
SUCCESS_STATUS = 200
VERIFIED = "verified"
