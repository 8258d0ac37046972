from fastapi.testclient import TestClient

from todo_graphql.main import create_app
from todo_graphql.schema import schema
from todo_graphql.store import TodoStore


class TestHealth:
    def test_health_check(self):
        client = TestClient(create_app())
        res = client.get("/")
        assert res.status_code == 200
        assert res.json() == {"message": "Healthy", "service": "graphql"}


class TestSchema:
    def test_sdl(self):
        sdl = str(schema)
        assert "todo(id: Int!): Todo" in sdl
        assert "todos: [Todo]" in sdl
        assert "updateTodo(id: Int!, completed: Boolean!): Todo" in sdl
        assert "id: Int\n" in sdl
        assert "title: String\n" in sdl
        assert "completed: Boolean\n" in sdl


class TestQueries:
    def setup_method(self):
        self.client = TestClient(create_app(TodoStore()))

    def post(self, query):
        res = self.client.post("/graphql", json={"query": query})
        assert res.status_code == 200
        return res.json()

    def test_single_todo(self):
        body = self.post("{ todo(id: 2) { id title completed } }")
        assert body == {"data": {"todo": {"id": 2, "title": "Build a GraphQL Server", "completed": False}}}

    def test_missing_todo_is_null_without_errors(self):
        body = self.post("{ todo(id: 999) { id title } }")
        assert body == {"data": {"todo": None}}

    def test_all_todos_in_seed_order(self):
        body = self.post("{ todos { id title completed } }")
        assert body["data"]["todos"] == [
            {"id": 1, "title": "Learn Go", "completed": False},
            {"id": 2, "title": "Build a GraphQL Server", "completed": False},
            {"id": 3, "title": "Buy milk", "completed": True},
        ]

    def test_get_query_parameter(self):
        res = self.client.get("/graphql", params={"query": "{ todo(id: 1) { title } }"})
        assert res.status_code == 200
        assert res.json() == {"data": {"todo": {"title": "Learn Go"}}}

    def test_variables_and_operation_name(self):
        res = self.client.post(
            "/graphql",
            json={
                "query": "query One($id: Int!) { todo(id: $id) { title } } query All { todos { id } }",
                "variables": {"id": 3},
                "operationName": "One",
            },
        )
        assert res.json() == {"data": {"todo": {"title": "Buy milk"}}}


class TestMutations:
    def setup_method(self):
        self.client = TestClient(create_app(TodoStore()))

    def post(self, query):
        res = self.client.post("/graphql", json={"query": query})
        assert res.status_code == 200
        return res.json()

    def test_update_todo(self):
        body = self.post("mutation { updateTodo(id: 3, completed: false) { id title completed } }")
        assert body == {"data": {"updateTodo": {"id": 3, "title": "Buy milk", "completed": False}}}

        todos = self.post("{ todos { id completed } }")["data"]["todos"]
        assert {"id": 3, "completed": False} in todos

    def test_update_missing_todo_returns_zero_value(self):
        body = self.post("mutation { updateTodo(id: 42, completed: true) { id title completed } }")
        assert body == {"data": {"updateTodo": {"id": 0, "title": "", "completed": False}}}
        assert len(self.post("{ todos { id } }")["data"]["todos"]) == 3

    def test_mutation_over_get(self):
        res = self.client.get("/graphql", params={"query": "mutation { updateTodo(id: 1, completed: true) { completed } }"})
        assert res.json() == {"data": {"updateTodo": {"completed": True}}}

    def test_stores_are_independent_per_app(self):
        self.post("mutation { updateTodo(id: 1, completed: true) { id } }")
        other = TestClient(create_app(TodoStore()))
        res = other.post("/graphql", json={"query": "{ todo(id: 1) { completed } }"})
        assert res.json()["data"]["todo"]["completed"] is False


class TestErrors:
    def setup_method(self):
        self.client = TestClient(create_app(TodoStore()))

    def test_missing_required_argument(self):
        res = self.client.post("/graphql", json={"query": "{ todo { id } }"})
        assert res.status_code == 200
        body = res.json()
        assert body["data"] is None
        assert len(body["errors"]) >= 1
        assert "id" in body["errors"][0]["message"]

    def test_syntax_error(self):
        res = self.client.post("/graphql", json={"query": "{ todos { id "})
        assert res.status_code == 200
        assert res.json()["errors"]

    def test_empty_query(self):
        res = self.client.get("/graphql")
        assert res.status_code == 200
        body = res.json()
        assert body["data"] is None
        assert body["errors"]

    def test_malformed_post_body_falls_back_to_url_query(self):
        res = self.client.post(
            "/graphql",
            params={"query": "{ todo(id: 2) { id } }"},
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert res.status_code == 200
        assert res.json() == {"data": {"todo": {"id": 2}}}

    def test_wrongly_typed_post_body_falls_back_to_url_query(self):
        res = self.client.post("/graphql", params={"query": "{ todo(id: 1) { id } }"}, json={"query": 7})
        assert res.json() == {"data": {"todo": {"id": 1}}}

    def test_null_query_in_body_is_an_empty_document(self):
        res = self.client.post(
            "/graphql",
            params={"query": "mutation { updateTodo(id: 1, completed: true) { id } }"},
            json={"query": None},
        )
        assert res.status_code == 200
        body = res.json()
        assert body["data"] is None
        assert body["errors"]
        # The URL mutation must not have run
        todo = self.client.post("/graphql", json={"query": "{ todo(id: 1) { completed } }"}).json()
        assert todo == {"data": {"todo": {"completed": False}}}

    def test_errors_are_logged(self, caplog):
        with caplog.at_level("ERROR", logger="todo_graphql"):
            self.client.post("/graphql", json={"query": "{ nope }"})
        assert any("GraphQL errors" in record.getMessage() for record in caplog.records)


class TestStore:
    def test_seeded_with_three_todos(self):
        assert [t["id"] for t in TodoStore().all()] == [1, 2, 3]

    def test_find_and_set_completed(self):
        store = TodoStore()
        assert store.find(999) is None
        assert store.set_completed(2, True) == {"id": 2, "title": "Build a GraphQL Server", "completed": True}
        assert store.find(2)["completed"] is True
        assert store.set_completed(999, True) is None

    def test_custom_seed_is_copied(self):
        seed = [{"id": 7, "title": "Custom", "completed": False}]
        store = TodoStore(seed)
        store.set_completed(7, True)
        assert seed[0]["completed"] is False
