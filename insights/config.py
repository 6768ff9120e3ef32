"""
Application configuration module.

Centralizes all configuration values and constants.
"""

import os
import shlex
from datetime import timedelta
from pathlib import Path
from dotenv import load_dotenv

# Project paths
PROJECT_ROOT = Path(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Load environment variables from .env file
load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

# Server configuration
SERVER_NAME = "insights-mcp-server"
SERVER_TITLE = "Zilliqa Insights MCP"
SERVER_VERSION = "1.0.0"
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3001"))

# Logging
APP_ENV = os.environ.get("APP_ENV", "development").lower()
LOG_LEVEL = os.environ.get("LOG_LEVEL", "")

# Google Cloud Monitoring
GCP_PROJECT_ID = os.environ.get("GCP_PROJECT_ID", "prj-p-devops-services-tvwmrf63")
GCE_INSTANCE_ID = os.environ.get("GCE_INSTANCE_ID", "7753770768243446498")
RESOURCE_TYPE = "gce_instance"

METRIC_TYPE_EARNINGS = "workload.googleapis.com/validator_earned_reward"
METRIC_TYPE_PROPOSALS = "prometheus.googleapis.com/zilliqa_proposed_views_total/counter"
METRIC_TYPE_COSIGNATURES = "prometheus.googleapis.com/zilliqa_cosigned_views_total/counter"
METRIC_TYPE_STAKE = "prometheus.googleapis.com/zilliqa_deposit_balance/gauge"
VALIDATORS_METRIC_TYPE = os.environ.get(
    "VALIDATORS_METRIC_TYPE", "workload.googleapis.com/zilliqa_validators"
)

# Downstream observability MCP server (launched over stdio)
DOWNSTREAM_COMMAND = os.environ.get("DOWNSTREAM_COMMAND", "node")
DOWNSTREAM_ARGS = shlex.split(
    os.environ.get(
        "DOWNSTREAM_ARGS", "gcloud-mcp/packages/observability-mcp/dist/bundle.js"
    )
)
DOWNSTREAM_TOOL = "list_time_series"


# Where the validator roster comes from
class RosterSource:
    STATIC = "static"
    METRICS = "metrics"


ROSTER_SOURCE = os.environ.get("ROSTER_SOURCE", RosterSource.STATIC).lower()

# Time windows
DEFAULT_WINDOW = timedelta(hours=1)
SNAPSHOT_WINDOW = timedelta(minutes=5)
WIDENED_WINDOW = timedelta(hours=24)

# Ranking
DEFAULT_TOP_LIMIT = 10
MAX_TOP_LIMIT = 100
