"""Contact address book with validated fields and XML file persistence."""
