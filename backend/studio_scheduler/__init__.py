"""Studio Scheduler backend package."""
