"""Tests for option lists and health endpoints."""

import pytest
from httpx import AsyncClient


class TestOptions:
    @pytest.mark.asyncio
    async def test_subjects(self, client: AsyncClient):
        response = await client.get("/api/v1/options/subjects")

        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data) == 17
        assert data[0] == "Matematika"
        assert "Bahasa Indonesia" in data

    @pytest.mark.asyncio
    async def test_grades_in_order(self, client: AsyncClient):
        response = await client.get("/api/v1/options/grades")

        data = response.json()["data"]
        assert data[0] == "1 SD"
        assert data[-1] == "12 SMK"
        assert len(data) == 15

    @pytest.mark.asyncio
    async def test_semesters(self, client: AsyncClient):
        response = await client.get("/api/v1/options/semesters")

        assert response.json() == {"success": True, "data": ["1", "2"]}


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["data"] == {"status": "healthy"}

    @pytest.mark.asyncio
    async def test_health_db(self, client: AsyncClient):
        response = await client.get("/api/v1/health/db")

        assert response.json()["data"] == {"status": "healthy", "database": "connected"}
