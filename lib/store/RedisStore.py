"""
lib/store/RedisStore.py

Purpose:
A NamespaceStore backed by a Redis server. Redis only offers flat keys, so every record is a single compressed JSON value and the directory structure is reduced to one children set per parent path.

Place in Architecture:
Chosen by StoreFor() for redis:// and rediss:// URIs. Suitable when several StrataFS processes share a namespace.

Interface:

	RedisStore(client=None): A redis.Redis (or compatible) client may be injected; otherwise Initialize connects using the uri.
	All NamespaceStore methods.

	Keys, relative to the configurable key_prefix (default "stratafs:"):
		inode:<path>      zlib compressed JSON of INode.ToDict()
		children:<path>   set of the direct child paths of <path>
		subblock:<id>     raw sub-block bytes

TODOs/FIXMEs:
None.
"""

import logging
from collections import deque

import redis

from .NamespaceStore import NamespaceStore
from ..fs.Inode import INode
from ..Upath import UniversalPath
from ..Utils import json_zlib_dumps, json_zlib_loads


class RedisStore(NamespaceStore):
	def __init__(this, client=None):
		this.redis = client
		this.ownsClient = client is None
		this.prefix = "stratafs:"

	def Initialize(this, uri, config):
		this.prefix = config.get('key_prefix', this.prefix)
		if (this.redis is None):
			this.redis = redis.Redis.from_url(str(uri))
		logging.info(f"Redis namespace store ready (prefix {this.prefix!r})")

	def Shutdown(this):
		if (this.redis is not None and this.ownsClient):
			this.redis.close()
			this.redis = None

	def InodeKey(this, path):
		return f"{this.prefix}inode:{UniversalPath(path)}"

	def ChildrenKey(this, path):
		return f"{this.prefix}children:{UniversalPath(path)}"

	def SubBlockKey(this, subBlockId):
		return f"{this.prefix}subblock:{subBlockId}"

	def RetrieveINode(this, path):
		data = this.redis.get(this.InodeKey(path))
		if (data is None):
			return None
		return INode.FromDict(json_zlib_loads(data))

	# The record and the parent's children entry change together, in one MULTI/EXEC.
	def StoreINode(this, path, inode):
		path = UniversalPath(path)
		parent = path.GetParent()
		with this.redis.pipeline(transaction=True) as pipe:
			pipe.set(this.InodeKey(path), json_zlib_dumps(inode.ToDict()))
			if (parent is not None):
				pipe.sadd(this.ChildrenKey(parent), str(path))
			pipe.execute()

	def DeleteINode(this, path):
		path = UniversalPath(path)
		parent = path.GetParent()
		with this.redis.pipeline(transaction=True) as pipe:
			pipe.delete(this.InodeKey(path))
			if (parent is not None):
				pipe.srem(this.ChildrenKey(parent), str(path))
			pipe.execute()

	def DeleteSubBlocks(this, inode):
		keys = [this.SubBlockKey(sub.id) for sub in inode.GetSubBlocks()]
		if (keys):
			this.redis.delete(*keys)

	def ListSubPaths(this, path):
		members = this.redis.smembers(this.ChildrenKey(path))
		return set(UniversalPath(m.decode('utf-8') if isinstance(m, bytes) else m) for m in members)

	# Breadth first over the children sets.
	def ListDeepSubPaths(this, path):
		path = UniversalPath(path)
		ret = set()
		pending = deque([path])
		while (pending):
			for child in this.ListSubPaths(pending.popleft()):
				if (child in ret or child == path):
					continue
				ret.add(child)
				pending.append(child)
		return ret

	def StoreSubBlock(this, subBlockId, data):
		this.redis.set(this.SubBlockKey(subBlockId), bytes(data))

	def RetrieveSubBlock(this, subBlockId):
		data = this.redis.get(this.SubBlockKey(subBlockId))
		if (data is None):
			return None
		return bytes(data)
