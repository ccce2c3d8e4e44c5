"""
Speech-to-Text providers

Providers are imported on demand so their SDKs stay optional at import time.
"""
