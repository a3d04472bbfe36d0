"""Command line front end for the GoTrue client."""
