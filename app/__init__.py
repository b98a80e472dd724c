"""
Presentation: Streamlit dashboard (app/streamlit_app.py) and the `proforma` command.
"""
