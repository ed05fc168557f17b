"""
Utility modules for the Streamlit frontend.

This package contains:
- api_client: Backend API communication
- state: Session state wrappers around fridgechef.state
"""
