"""Sweet shop inventory service and client."""
