# Services package - business logic behind the tracker routes
