"""
WP-JSON Endpoint Mapper Package

A Python tool for reading a WordPress site's REST API discovery document
and listing the endpoint paths and href URLs it describes.
"""

__version__ = "1.0.0"
__description__ = "WordPress wp-json endpoint and href extraction tool"
