# Blueprints package - one Flask blueprint per feature area
