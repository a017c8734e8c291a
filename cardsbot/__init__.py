"""Fill-in-the-blank card game sessions for chat channels."""
