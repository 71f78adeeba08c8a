"""Core contracts: RBAC registries, identity models and shared errors."""
