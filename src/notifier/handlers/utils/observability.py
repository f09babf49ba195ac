"""
Powertools instances shared by every notification Lambda.

Handlers, the notification service and the HTTP clients import ``logger``,
``tracer`` and ``metrics`` from here so a single invocation emits one set of
structured logs, one trace and one metrics blob.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

METRICS_NAMESPACE = 'RetailNotifier'

# service name comes from POWERTOOLS_SERVICE_NAME, level from LOG_LEVEL
logger: Logger = Logger()

# POWERTOOLS_TRACE_DISABLED=true turns X-Ray off in tests
tracer: Tracer = Tracer()

# an explicit namespace wins over POWERTOOLS_METRICS_NAMESPACE
metrics = Metrics(namespace=METRICS_NAMESPACE)
