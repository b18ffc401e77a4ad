from .Inode import INodeType, INode, Block, SubBlock
from .FileStatus import FileStatus
