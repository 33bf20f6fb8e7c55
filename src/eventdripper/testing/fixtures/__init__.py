"""Testing fixtures – load with ``pytest_plugins = ["eventdripper.testing.fixtures"]``."""
from eventdripper.testing.fixtures.clock import fake_clock
from eventdripper.testing.fixtures.webhooks import webhook_secret, webhook_signer

__all__ = ["fake_clock", "webhook_secret", "webhook_signer"]
