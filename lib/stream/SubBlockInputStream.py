import io
import bisect

from ..Errors import InconsistentNamespace


# Reads the content of a FILE INode back out of the store, one sub-block at a time.
# Only the sub-block currently being read is held in memory.
class SubBlockInputStream(io.RawIOBase):
	def __init__(this, store, inode, path=None):
		super().__init__()
		this.store = store
		this.path = path

		# Absolute start offset of every sub-block, in content order.
		this.subBlocks = []
		this.starts = []
		for block in inode.blocks or []:
			for sub in block.subBlocks:
				this.starts.append(block.offset + sub.offset)
				this.subBlocks.append(sub)

		this.length = inode.GetLength()
		this.position = 0

		this.currentIndex = None
		this.currentData = None

	def readable(this):
		return True

	def seekable(this):
		return True

	def seek(this, offset, whence=io.SEEK_SET):
		if (this.closed):
			raise ValueError("seek on closed file")
		if (whence == io.SEEK_SET):
			position = offset
		elif (whence == io.SEEK_CUR):
			position = this.position + offset
		elif (whence == io.SEEK_END):
			position = this.length + offset
		else:
			raise ValueError(f"invalid whence ({whence})")

		if (position < 0):
			raise ValueError(f"negative seek position {position}")
		this.position = position
		return this.position

	def tell(this):
		return this.position

	def LoadSubBlock(this, index):
		if (this.currentIndex == index):
			return this.currentData

		sub = this.subBlocks[index]
		data = this.store.RetrieveSubBlock(sub.id)
		if (data is None or len(data) < sub.length):
			raise InconsistentNamespace(this.path or sub.id, f"Sub-block {sub.id} is missing or truncated")

		this.currentIndex = index
		this.currentData = data
		return data

	def readinto(this, buffer):
		if (this.closed):
			raise ValueError("read from closed file")

		view = memoryview(buffer).cast('B')
		if (this.position >= this.length or not len(view)):
			return 0

		index = bisect.bisect_right(this.starts, this.position) - 1
		sub = this.subBlocks[index]
		data = this.LoadSubBlock(index)

		inner = this.position - this.starts[index]
		count = min(len(view), sub.length - inner)
		view[:count] = data[inner:inner + count]
		this.position += count
		return count

	def close(this):
		this.currentData = None
		super().close()
