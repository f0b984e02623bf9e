"""Core Layer — domain types, error hierarchy and boundary protocols. No IO."""
