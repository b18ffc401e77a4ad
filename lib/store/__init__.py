from urllib.parse import urlparse

from .NamespaceStore import NamespaceStore
from .SQLStore import SQLStore
from .RedisStore import RedisStore


# RETURNS an uninitialized NamespaceStore suited to the given uri.
def StoreFor(uri):
	scheme = urlparse(str(uri)).scheme.lower()
	if (scheme in ('redis', 'rediss', 'unix')):
		return RedisStore()
	return SQLStore()
