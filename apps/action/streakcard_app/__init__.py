"""Command-line wrapper that fetches GitHub streak data and writes the card."""
