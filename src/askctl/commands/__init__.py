"""Click plumbing for the askctl command: base command class and app context."""
