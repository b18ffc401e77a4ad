from .Upath import UniversalPath, normalize
from .Errors import *
from .fs import INodeType, INode, Block, SubBlock, FileStatus
from .store import NamespaceStore, SQLStore, RedisStore, StoreFor
from .stream import SubBlockOutputStream, SubBlockInputStream
from .FilesystemProvider import FilesystemProvider
from .StrataFS import StrataFS
