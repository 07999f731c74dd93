"""Zero-touch provisioning helpers: circuit IDs and vendor data."""