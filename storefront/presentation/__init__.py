"""
Presentation Layer

Read models for basket views and the JSON API.
"""
