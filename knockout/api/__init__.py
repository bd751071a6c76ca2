"""
HTTP API for Knock Out!
"""
