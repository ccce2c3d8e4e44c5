"""
Utility helpers for wavscribe
"""
