"""
Configuration for the post search engine: static lookup tables,
tunable scoring weights and environment settings.
"""
