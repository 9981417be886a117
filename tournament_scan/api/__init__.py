"""
API Module - HTTP service for the tournament scanner
"""
