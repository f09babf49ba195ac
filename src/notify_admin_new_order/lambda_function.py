"""
Notify Admin New Order Lambda Function - Entry point for the new order alert sent to every administrator.

This module serves as the Lambda function entry point that delegates to the
generic notification handler configured for this variant.
"""

import os
import sys
from typing import Any, Dict

# Add the notifier module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from notifier.handlers.notification_handler import create_lambda_handler
from notifier.logic.variants import NEW_ORDER_ADMIN_NOTIFY

notification_handler = create_lambda_handler(NEW_ORDER_ADMIN_NOTIFY)


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the new order alert sent to every administrator.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return notification_handler(event, context)
