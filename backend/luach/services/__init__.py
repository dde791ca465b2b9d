"""Services Layer — imperative shell: settings, logging and payloads around core/ calls."""
