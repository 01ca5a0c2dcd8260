"""
Services Module

Account creation and the storage operations behind the HTTP routes.
"""
