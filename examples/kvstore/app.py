"""Key-value store: a JSON API served by a kitty router.

Routes:
    GET    /val        all pairs
    GET    /val/:key   one pair
    POST   /val        upsert every pair of a JSON object
    PUT    /val        same as POST
    PUT    /val/:key   upsert one JSON value
    DELETE /val/:key   remove one pair

Run:
    cd examples/kvstore && kitty run app:router
"""

from kitty import Request, Response, Router, RouterConfig, var
from store import Store, Upsert


def error(status: int, message: str) -> Response:
    return Response.from_json({"error": message}, status=status)


def not_found(request: Request) -> Response:
    return error(404, "not found")


class Handlers:
    """Route handlers sharing one injected store."""

    __slots__ = ("store",)

    def __init__(self, store: Store) -> None:
        self.store = store

    def get_val(self, request: Request) -> Response:
        """GET /val and GET /val/:key."""
        key, found = var(request, "key")
        if not found:
            return Response.from_json(self.store.list())

        value, exists = self.store.get(key)
        if not exists:
            return error(404, f"can't find key {key}")
        return Response.from_json({key: value})

    async def post_val(self, request: Request) -> Response:
        """POST or PUT /val with a JSON object body."""
        try:
            data = await request.json()
        except ValueError as exc:
            return error(400, str(exc))
        if not isinstance(data, dict):
            return error(400, "expected a JSON object")

        outcomes = [self.store.upsert(k, v) for k, v in data.items()]
        status = 201 if Upsert.CREATED in outcomes else 200
        return Response.from_json(data, status=status)

    async def put_val(self, request: Request) -> Response:
        """PUT /val/:key with a JSON value body."""
        key, _ = var(request, "key")
        try:
            value = await request.json()
        except ValueError as exc:
            return error(400, str(exc))

        outcome = self.store.upsert(key, value)
        status = 201 if outcome is Upsert.CREATED else 200
        return Response.from_json({key: value}, status=status)

    def delete_val(self, request: Request) -> Response:
        """DELETE /val/:key."""
        key, _ = var(request, "key")
        value, existed = self.store.delete(key)
        if not existed:
            return error(404, f"can't find key {key}")
        return Response.from_json({key: value})


def create_router(store: Store | None = None, config: RouterConfig | None = None) -> Router:
    """Build the key-value router around *store* (a fresh one by default)."""
    handlers = Handlers(store or Store())

    router = Router(not_found=not_found, config=config)
    router.add("GET", "/val", handlers.get_val)
    router.add("GET", "/val/:key", handlers.get_val)
    router.add("POST", "/val", handlers.post_val)
    router.add("PUT", "/val", handlers.post_val)
    router.add("PUT", "/val/:key", handlers.put_val)
    router.add("DELETE", "/val/:key", handlers.delete_val)
    return router


router = create_router()


if __name__ == "__main__":
    router.run(port=8080)
