"""
Core pipeline and configuration for wavscribe
"""
