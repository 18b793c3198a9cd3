#!/usr/bin/env python
"""
Gateway Example

Authenticates against a DeviceWISE portal, lists the gateways of the
organization and runs a user operation on the first one.

Configure through DWAPI_ENDPOINT, DWAPI_APPLICATION_TOKEN and
DWAPI_ORGANIZATION_TOKEN.
"""

import sys
import json
import logging

from dwapi import ClientConfig, DwApiClient, DwApiError
from dwapi.telemetry import setup_tracer, setup_metrics

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main(with_telemetry: bool = False) -> int:
    if with_telemetry:
        setup_tracer("dwapi-example")
        setup_metrics("dwapi-example")

    config = ClientConfig.from_env()
    logger.info(f"Using config: {config.to_dict()}")
    client = DwApiClient.from_config(config)

    try:
        client.ping()
        client.login()

        gateways = client.list_gateways()
        logger.info(f"Gateways: {json.dumps(gateways, indent=2)}")

        if gateways:
            cloudlink_id = gateways[0]["cloudlinkId"]
            details = client.gateway_details(cloudlink_id)
            logger.info(f"Details for {cloudlink_id}: {json.dumps(details, indent=2)}")
            client.exec_userop(cloudlink_id, "ping_device", {"timeout": 5})
            logger.info("User operation accepted")
    except DwApiError as e:
        logger.error(f"API call failed: {e}")
        logger.debug(f"Last request: {client.last_sent}")
        logger.debug(f"Last response: {client.last_received}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main(with_telemetry="--telemetry" in sys.argv))
