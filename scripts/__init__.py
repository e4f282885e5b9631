"""Command line harnesses for the romu package."""
