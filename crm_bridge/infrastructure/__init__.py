"""Infrastructure Layer: the CRM HTTP client and logging setup.

Invariants:
    - Every outbound call goes through CrmClient.request (single error-normalization point)
"""
