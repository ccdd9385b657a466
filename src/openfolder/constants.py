APP_NAME = "openfolder"
ENV_PREFIX = "OPENFOLDER_"
