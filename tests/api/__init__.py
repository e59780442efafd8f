"""API tests: routers, access gate and problem details via TestClient."""
