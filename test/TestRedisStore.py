import redis
import fakeredis

from StandardTestFixture import StandardTestFixture
from StoreContract import StoreContract, Directory, File, Paths

from libstratafs import RedisStore, StrataFS


class TestRedisStore(StoreContract, StandardTestFixture):

	def setup_method(this, method):
		super().setup_method(method)
		this.client = fakeredis.FakeRedis(server=fakeredis.FakeServer())
		this.store = RedisStore(this.client)
		this.store.Initialize("redis://localhost:6379/0", {'key_prefix': "test:"})

	def test_key_layout(this):
		this.store.StoreINode("/", Directory())
		this.store.StoreINode("/a", File("s1"))
		this.store.StoreSubBlock("s1", b"1234")

		keys = set(k.decode('utf-8') for k in this.client.keys("test:*"))
		this.assert_equal(keys, {"test:inode:/", "test:inode:/a", "test:children:/", "test:subblock:s1"})

	def test_shutdown_keeps_injected_client(this):
		this.store.Shutdown()
		this.store.StoreINode("/", Directory())
		assert this.store.RetrieveINode("/").IsDirectory()

	def test_filesystem_on_redis(this):
		fs = StrataFS(this.store, user="tester")
		fs.Initialize("redis://localhost:6379/0", {'subblock_size': 3})

		this.write_file(fs, "/data/f1", b"first")
		this.write_file(fs, "/data/sub/f2", b"second")
		assert fs.Rename("/data", "/archive")

		this.assert_equal(this.read_file(fs, "/archive/sub/f2"), b"second")
		this.assert_equal(fs.ListStatus("/data"), None)
		this.assert_equal([str(s.GetPath()) for s in fs.ListStatus("/archive")], ["/archive/f1", "/archive/sub"])

		assert fs.Delete("/archive")
		this.assert_equal(set(k.decode('utf-8') for k in this.client.keys("test:subblock:*")), set())
		this.assert_equal(fs.ListStatus("/"), [])

	def test_record_and_children_set_change_together(this):
		pipeline = this.client.pipeline
		def FailingPipeline(*args, **kw):
			pipe = pipeline(*args, **kw)
			def execute(*a, **k):
				pipe.reset()
				raise redis.ConnectionError("connection lost")
			pipe.execute = execute
			return pipe

		this.store.StoreINode("/", Directory())
		this.store.StoreINode("/d", Directory())

		this.client.pipeline = FailingPipeline
		this.assert_raises(redis.ConnectionError, this.store.StoreINode, "/d/f", File())
		del this.client.pipeline
		this.assert_equal(this.store.RetrieveINode("/d/f"), None)
		this.assert_equal(this.store.ListDeepSubPaths("/d"), set())

		this.store.StoreINode("/d/f", File())
		this.client.pipeline = FailingPipeline
		this.assert_raises(redis.ConnectionError, this.store.DeleteINode, "/d/f")
		del this.client.pipeline
		assert this.store.RetrieveINode("/d/f").IsFile()
		this.assert_equal(this.store.ListDeepSubPaths("/d"), Paths("/d/f"))

		fs = StrataFS(this.store, user="tester")
		fs.Initialize("redis://localhost:6379/0", {})
		assert fs.Rename("/d", "/e")
		assert fs.IsFile("/e/f")
		this.assert_equal(this.store.ListDeepSubPaths("/"), Paths("/e", "/e/f"))
