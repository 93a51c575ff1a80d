"""HTTP client that waits for a deployed calculator service to become ready."""
import time

from pydantic import BaseModel, ConfigDict, Field
import requests

from calculator_service.common.logger import logger
from calculator_service.common.operations import HealthStatus


class HealthChecker(BaseModel):
    """
    Probe the /health endpoint of a running service.

    Mirrors the verification stage of the deployment pipeline: the service is
    "ready" once GET /health answers 200 with {"status": "ok"}; refused
    connections and timeouts only mean "not ready yet".
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(default="http://127.0.0.1:5000/health", description="Health endpoint URL")
    attempts: int = Field(default=10, ge=1, description="Maximum number of probes")
    interval: float = Field(default=5.0, ge=0, description="Seconds between probes")
    timeout: float = Field(default=2.0, gt=0, description="Per-request timeout in seconds")

    def check_once(self) -> bool:
        """
        Send a single health probe.

        :return: True if the service answered with the expected payload
        :rtype: bool
        """
        try:
            response = requests.get(self.url, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            logger.debug(f"🩺 {self.url} unreachable: {exc}")
            return False

        if response.status_code != 200:
            logger.debug(f"🩺 {self.url} answered {response.status_code}")
            return False
        try:
            return response.json() == HealthStatus().model_dump()
        except ValueError:
            return False

    def wait_until_ready(self) -> bool:
        """
        Probe up to ``attempts`` times, sleeping ``interval`` seconds in between.

        :return: True as soon as one probe succeeds, False if all fail
        :rtype: bool
        """
        for attempt in range(1, self.attempts + 1):
            if self.check_once():
                logger.info(f"🩺✅ Service ready after {attempt} attempt(s)")
                return True
            logger.info(f"🩺 Attempt {attempt}/{self.attempts}: service not ready")
            if attempt < self.attempts:
                time.sleep(self.interval)
        logger.error(f"🩺❌ Service at {self.url} not ready after {self.attempts} attempts")
        return False
