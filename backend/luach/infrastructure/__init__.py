"""Infrastructure Layer — process-level concerns (logging) kept out of core/."""
