"""
Speech provider implementations for wavscribe
"""
