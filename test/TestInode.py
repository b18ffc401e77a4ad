from StandardTestFixture import StandardTestFixture

from libstratafs import INode, INodeType, Block, SubBlock, FileStatus


class TestInode(StandardTestFixture):

	def test_directory_has_no_content(this):
		inode = INode("u", "g", 0o755, INodeType.DIRECTORY)
		this.assert_equal(inode.blocks, None)
		this.assert_equal(inode.GetLength(), 0)
		this.assert_equal(inode.GetSubBlocks(), [])
		assert inode.IsDirectory() and not inode.IsFile()
		this.assert_raises(ValueError, INode, "u", "g", 0o755, INodeType.DIRECTORY, [Block("b", 0, 1)])

	def test_file_length_and_sub_blocks(this):
		blocks = [
			Block("b0", 0, 8, [SubBlock("s0", 0, 4), SubBlock("s1", 4, 4)]),
			Block("b1", 8, 3, [SubBlock("s2", 0, 3)]),
		]
		inode = INode("u", "g", 0o644, INodeType.FILE, blocks, 8)
		this.assert_equal(inode.GetLength(), 11)
		this.assert_equal([s.id for s in inode.GetSubBlocks()], ["s0", "s1", "s2"])

		copy = INode.FromDict(inode.ToDict())
		this.assert_equal(copy, inode)
		this.assert_equal(copy.ToDict()['fileType'], "FILE")

	def test_status(this):
		inode = INode("alice", "staff", 0o640, INodeType.FILE, [Block("b0", 0, 5, [SubBlock("s0", 0, 5)])], 64)
		status = FileStatus("/docs/x", inode)
		assert status.IsFile()
		this.assert_equal(status.GetLength(), 5)
		this.assert_equal(status.blockSize, 64)
		this.assert_equal(status.GetModeString(), "-rw-r-----")
