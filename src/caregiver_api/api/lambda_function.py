"""AWS Lambda entrypoint for API Gateway proxy integrations."""

from caregiver_api.api.gateway import create_lambda_handler
from caregiver_api.containers import build_container

handler = create_lambda_handler(build_container())
