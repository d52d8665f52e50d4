"""Streamlit dashboard and chart building."""
