"""Course management: lesson listing, search, sorting and pagination."""
