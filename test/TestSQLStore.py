import sqlalchemy
from sqlalchemy.dialects import mysql
from sqlalchemy.schema import CreateTable

from StandardTestFixture import StandardTestFixture
from StoreContract import StoreContract, Directory, Paths

from libstratafs import SQLStore, StoreFor, RedisStore
from libstratafs.store.SQLStore import EscapeLike
from libstratafs.db.InodeModel import Base, InodeModel


class TestSQLStore(StoreContract, StandardTestFixture):

	def setup_method(this, method):
		super().setup_method(method)
		this.store = SQLStore()
		this.store.Initialize(this.db_uri, {})

	def teardown_method(this, method):
		this.store.Shutdown()
		super().teardown_method(method)

	def test_persists_across_connections(this):
		this.store.StoreINode("/kept", Directory())
		this.store.Shutdown()

		other = SQLStore()
		other.Initialize(this.db_uri, {})
		try:
			assert other.RetrieveINode("/kept").IsDirectory()
		finally:
			other.Shutdown()

	def test_use_before_initialize(this):
		this.assert_raises(IOError, SQLStore().RetrieveINode, "/")

	def test_escape_like(this):
		this.assert_equal(EscapeLike("/a_b%c\\d"), "/a\\_b\\%c\\\\d")

	# MySQL rejects index keys over 3072 bytes, i.e. 768 utf8mb4 characters.
	def test_keys_fit_mysql_index_limit(this):
		for table in Base.metadata.sorted_tables:
			for column in table.columns:
				if (column.primary_key or column.index):
					assert isinstance(column.type, sqlalchemy.String)
					assert column.type.length is not None and column.type.length <= 768, f"{table.name}.{column.name}"

		ddl = str(CreateTable(InodeModel.__table__).compile(dialect=mysql.dialect()))
		assert "VARCHAR(64) NOT NULL" in ddl
		assert "PRIMARY KEY (id)" in ddl

	def test_long_paths(this):
		deep = "/" + "/".join(["segment-" + "x" * 90] * 60)
		this.store.StoreINode(deep, Directory())
		this.store.StoreINode(deep + "/leaf", Directory())
		assert this.store.RetrieveINode(deep).IsDirectory()
		this.assert_equal(this.store.ListSubPaths(deep), Paths(deep + "/leaf"))


class TestStoreFor(StandardTestFixture):

	def test_scheme(this):
		assert isinstance(StoreFor("sqlite:///x.db"), SQLStore)
		assert isinstance(StoreFor("mysql://u:p@host/db"), SQLStore)
		assert isinstance(StoreFor("redis://localhost:6379/0"), RedisStore)
		assert isinstance(StoreFor("rediss://localhost:6380/1"), RedisStore)
