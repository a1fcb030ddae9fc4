"""kbchat command-line interface."""
