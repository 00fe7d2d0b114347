"""Terminal output: the stderr console for prompts and messages."""
