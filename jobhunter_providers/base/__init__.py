"""
Providers Base Package

Provider-agnostic contracts shared by every backend adapter and the service
layer:

- Models: frozen value objects for requests, results, and resolved config
- Interfaces: the ``AIProvider`` protocol implemented by each backend
- Errors: upstream classification plus the dispatch error hierarchy
- Cancellation: cooperative tokens that abandon in-flight HTTP calls
- Registry: the closed, immutable provider lookup table
"""
