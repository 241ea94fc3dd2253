"""
payload-guard - Request payload validation and centralized error handling.

Shows three equivalent ways to validate a JSON body (inline, reusable
dependency, framework-native) and a flash-and-redirect flow for HTML forms.
"""

__version__ = "0.1.0"
