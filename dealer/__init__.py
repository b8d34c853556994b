"""Command line front end for the fairdeck engine."""
