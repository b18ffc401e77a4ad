from libstratafs import UniversalPath, INode, INodeType, Block, SubBlock


def Directory():
	return INode("u", "g", 0o755, INodeType.DIRECTORY)


def File(*subBlockIds):
	subBlocks = [SubBlock(id, i * 4, 4) for i, id in enumerate(subBlockIds)]
	return INode("u", "g", 0o600, INodeType.FILE, [Block("b0", 0, 4 * len(subBlocks), subBlocks)], 1024)


def Paths(*paths):
	return set(UniversalPath(p) for p in paths)


# Behaviour every NamespaceStore must share.
# Subclasses set this.store in setup_method.
class StoreContract(object):

	def test_put_get_delete(this):
		this.assert_equal(this.store.RetrieveINode("/a"), None)

		inode = File("s1", "s2")
		this.store.StoreINode("/a", inode)
		this.assert_equal(this.store.RetrieveINode("/a"), inode)
		this.assert_equal(this.store.RetrieveINode(UniversalPath("/a/")), inode)

		this.store.StoreINode("/a", Directory())
		assert this.store.RetrieveINode("/a").IsDirectory()
		this.assert_equal(this.store.RetrieveINode("/a").blocks, None)

		this.store.DeleteINode("/a")
		this.assert_equal(this.store.RetrieveINode("/a"), None)
		# Deleting again is harmless.
		this.store.DeleteINode("/a")

	def test_no_implicit_directories(this):
		this.store.StoreINode("/x/y/z", File())
		this.assert_equal(this.store.RetrieveINode("/x"), None)
		this.assert_equal(this.store.RetrieveINode("/x/y"), None)

	def test_list_sub_paths(this):
		for p in ["/", "/a", "/a/b", "/a/b/c", "/a/d", "/ab", "/e"]:
			this.store.StoreINode(p, Directory())

		this.assert_equal(this.store.ListSubPaths("/"), Paths("/a", "/ab", "/e"))
		this.assert_equal(this.store.ListSubPaths("/a"), Paths("/a/b", "/a/d"))
		this.assert_equal(this.store.ListSubPaths("/a/b/c"), set())
		this.assert_equal(this.store.ListSubPaths("/missing"), set())

	def test_list_deep_sub_paths(this):
		for p in ["/", "/a", "/a/b", "/a/b/c", "/a/d", "/ab", "/ab/x"]:
			this.store.StoreINode(p, Directory())

		this.assert_equal(this.store.ListDeepSubPaths("/a"), Paths("/a/b", "/a/b/c", "/a/d"))
		this.assert_equal(this.store.ListDeepSubPaths("/"), Paths("/a", "/a/b", "/a/b/c", "/a/d", "/ab", "/ab/x"))
		this.assert_equal(this.store.ListDeepSubPaths("/a/d"), set())

	def test_listing_follows_deletes(this):
		for p in ["/", "/a", "/a/b", "/a/c"]:
			this.store.StoreINode(p, Directory())
		this.store.DeleteINode("/a/b")
		this.assert_equal(this.store.ListSubPaths("/a"), Paths("/a/c"))
		this.assert_equal(this.store.ListDeepSubPaths("/"), Paths("/a", "/a/c"))

	def test_special_characters(this):
		for p in ["/", "/100%", "/100%/x", "/1000", "/a_b", "/a_b/y", "/axb", "/axb/z"]:
			this.store.StoreINode(p, Directory())

		this.assert_equal(this.store.ListDeepSubPaths("/100%"), Paths("/100%/x"))
		this.assert_equal(this.store.ListDeepSubPaths("/a_b"), Paths("/a_b/y"))

	def test_sub_blocks(this):
		this.assert_equal(this.store.RetrieveSubBlock("s1"), None)
		this.store.StoreSubBlock("s1", b"abcd")
		this.store.StoreSubBlock("s2", bytearray(b"efgh"))
		this.store.StoreSubBlock("s3", b"keep")
		this.assert_equal(this.store.RetrieveSubBlock("s2"), b"efgh")

		this.store.DeleteSubBlocks(File("s1", "s2"))
		this.assert_equal(this.store.RetrieveSubBlock("s1"), None)
		this.assert_equal(this.store.RetrieveSubBlock("s2"), None)
		this.assert_equal(this.store.RetrieveSubBlock("s3"), b"keep")

		# Files without content and directories release nothing.
		this.store.DeleteSubBlocks(File())
		this.store.DeleteSubBlocks(Directory())
