# Utilities shared by blueprints and services
