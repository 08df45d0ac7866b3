"""Admission intake application.

This package contains the admission record models, the English-to-Marathi
name transliteration services, serializers, views and route registrations
of the bilingual intake API.
"""
