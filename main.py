#!/usr/bin/env python3
"""
WP-JSON Endpoint Mapper - Main Entry Point

A tool for reading WordPress REST API discovery documents and listing
the endpoint paths and href URLs they describe.
"""

from wpjson_mapper.cli import main


if __name__ == "__main__":
    main()
