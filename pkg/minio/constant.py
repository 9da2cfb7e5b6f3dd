# Listing
DEFAULT_MAX_KEYS = 1000

# Storage classes
STORAGE_CLASS_STANDARD = "STANDARD"
STORAGE_CLASS_STANDARD_IA = "STANDARD_IA"
STORAGE_CLASS_GLACIER = "GLACIER"

# Canned ACLs
ACL_PUBLIC_READ = "public-read"

# Request headers understood by S3-compatible stores
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_STORAGE_CLASS = "x-amz-storage-class"
HEADER_ACL = "x-amz-acl"

DEFAULT_CONTENT_TYPE = "image/png"

# S3 error codes meaning the object is absent
NOT_FOUND_CODES = frozenset({"NoSuchKey", "NoSuchObject", "ResourceNotFound"})
