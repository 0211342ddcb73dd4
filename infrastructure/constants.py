from pathlib import Path

# Repo-root conventional directories/files (overrideable on the command line)
CONFIG_DIR = Path("configs")
BROWSER_CONFIG_FILE = CONFIG_DIR / "browser.yaml"

# Environment variable naming an alternative browser.yaml
CONFIG_ENV_VAR = "TAXONOMY_BROWSER_CONFIG"
