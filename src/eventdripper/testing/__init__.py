"""Testing – fakes and pytest fixtures for code that receives or sends webhooks."""
