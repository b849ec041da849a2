"""Built-in defaults for Renovator."""

DEFAULT_CONFIGFILE = "renovate.json"
DEFAULT_ENVFILE = "renovate.env"
DEFAULT_IMAGE = "docker.io/renovate/renovate:full"
DEFAULT_CONTAINER_ENGINE = "docker"
DEFAULT_SETTINGS_FILE = ".renovator.yml"

INTERNAL_CONFIG_DIR = "/usr/src/app"
INTERNAL_CONFIG_STEM = "config"
FALLBACK_CONFIG_EXTENSION = "json"
CONFIG_FILE_ENV_VAR = "RENOVATE_CONFIG_FILE"

CONFIG_TEMPLATE = """{
  "onboarding": true,
  "prFooter": "This PR generated by Renovate orchestrated by Renovator."
}
"""

ENV_TEMPLATE = """# This is a sample .env file
# RENOVATE_TOKEN=value
# RENOVATE_GITHUB_COM_TOKEN=value
"""
