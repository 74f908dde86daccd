"""
Serving — FastAPI application exposing the upload endpoint.
"""
