"""
Utility modules for the Streamlit frontend.

This package contains:
- api_client: Builds the recipe store the pages talk to
- session: Client storage, admin login state and the admin gate
- state: View models kept in session state across reruns
"""
