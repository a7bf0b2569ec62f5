"""molcodec command line interface."""
