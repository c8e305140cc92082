"""
Core package for the backend service.

This package contains the main application logic and components including:
- Data models for conversations, documents and the model catalogue
- Services for model dispatch, storage, identity and prompt generation
- API routes and endpoints
"""
