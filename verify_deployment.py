#!/usr/bin/env python3
"""
Post-deployment verification script.

Checks a running DevOps Demo service:
1. /health reports healthy with a version
2. /ready reports ready
3. /metrics reports version, uptime and memory
4. /api/info returns the app document
5. / serves the HTML landing page
6. Unknown routes fall back to the 404 envelope

Usage: python verify_deployment.py [BASE_URL] [EXPECTED_VERSION]
"""
import asyncio
import sys
import httpx

BASE_URL = "http://localhost:3000"


async def verify_health(client: httpx.AsyncClient, expected_version=None):
    print("\n" + "="*60)
    print("VERIFICATION 1: Health")
    print("="*60)

    try:
        response = await client.get("/health")
        data = response.json()
        if response.status_code != 200 or data.get("status") != "healthy":
            print(f"❌ Unexpected response: {response.status_code} {data}")
            return False
        print(f"✅ Healthy (version={data['version']}, uptime={data['uptimeSeconds']:.1f}s)")

        if expected_version and data["version"] != expected_version:
            print(f"❌ Version mismatch: expected {expected_version}, got {data['version']}")
            return False
        return True
    except Exception as e:
        print(f"❌ Failed: {e}")
        return False


async def verify_readiness(client: httpx.AsyncClient):
    print("\n" + "="*60)
    print("VERIFICATION 2: Readiness")
    print("="*60)

    try:
        response = await client.get("/ready")
        if response.status_code == 200 and response.json().get("status") == "ready":
            print("✅ Ready")
            return True
        print(f"❌ Unexpected response: {response.status_code} {response.text}")
        return False
    except Exception as e:
        print(f"❌ Failed: {e}")
        return False


async def verify_metrics(client: httpx.AsyncClient):
    print("\n" + "="*60)
    print("VERIFICATION 3: Metrics")
    print("="*60)

    try:
        first = (await client.get("/metrics")).json()
        await asyncio.sleep(0.2)
        second = (await client.get("/metrics")).json()

        missing = {"version", "uptimeSeconds", "memory"} - set(first)
        if missing:
            print(f"❌ Missing fields: {sorted(missing)}")
            return False

        print(f"✅ RSS: {first['memory']['rss'] / 1024 / 1024:.1f} MiB")
        print(f"✅ Runtime: Python {first['runtimeVersion']} on {first['platform']} ({first['environmentName']})")

        if second["uptimeSeconds"] < first["uptimeSeconds"]:
            print("❌ Uptime went backwards")
            return False
        print("✅ Uptime is non-decreasing")
        return True
    except Exception as e:
        print(f"❌ Failed: {e}")
        return False


async def verify_info(client: httpx.AsyncClient):
    print("\n" + "="*60)
    print("VERIFICATION 4: App Info")
    print("="*60)

    try:
        data = (await client.get("/api/info")).json()
        if data.get("app") != "DevOps Demo" or len(data.get("techStack", [])) != 6:
            print(f"❌ Unexpected document: {data}")
            return False
        print(f"✅ {data['app']} {data['version']} built at {data['buildTime']}")
        print(f"✅ Tech stack: {' → '.join(data['techStack'])}")
        return True
    except Exception as e:
        print(f"❌ Failed: {e}")
        return False


async def verify_landing_page(client: httpx.AsyncClient):
    print("\n" + "="*60)
    print("VERIFICATION 5: Landing Page")
    print("="*60)

    try:
        response = await client.get("/")
        content_type = response.headers.get("content-type", "")
        if response.status_code == 200 and content_type.startswith("text/html") and "DevOps Demo" in response.text:
            print("✅ Landing page served")
            return True
        print(f"❌ Unexpected response: {response.status_code} {content_type}")
        return False
    except Exception as e:
        print(f"❌ Failed: {e}")
        return False


async def verify_not_found(client: httpx.AsyncClient):
    print("\n" + "="*60)
    print("VERIFICATION 6: 404 Fallback")
    print("="*60)

    try:
        response = await client.get("/nonexistent-path")
        data = response.json()
        if response.status_code == 404 and data.get("error") == "Route not found":
            print(f"✅ 404 envelope returned for {data['path']}")
            return True
        print(f"❌ Unexpected response: {response.status_code} {data}")
        return False
    except Exception as e:
        print(f"❌ Failed: {e}")
        return False


async def main(base_url: str, expected_version=None):
    print("\n" + "="*60)
    print("DEPLOYMENT VERIFICATION")
    print(f"Target: {base_url}")
    print("="*60)

    results = {}

    async with httpx.AsyncClient(base_url=base_url, timeout=5.0) as client:
        results["health"] = await verify_health(client, expected_version)
        results["readiness"] = await verify_readiness(client)
        results["metrics"] = await verify_metrics(client)
        results["info"] = await verify_info(client)
        results["landing_page"] = await verify_landing_page(client)
        results["not_found"] = await verify_not_found(client)

    print("\n" + "="*60)
    print("VERIFICATION SUMMARY")
    print("="*60)

    for key, passed in results.items():
        status = "✅ VERIFIED" if passed else "❌ FAILED"
        print(f"{key:45s} {status}")

    total = len(results)
    passed = sum(results.values())

    print(f"\nResult: {passed}/{total} checks passed")

    if passed == total:
        print("\n🎉 Deployment looks good!")
        return 0
    else:
        print(f"\n⚠️  {total - passed} check(s) failed")
        return 1


if __name__ == "__main__":
    url = sys.argv[1] if len(sys.argv) > 1 else BASE_URL
    version = sys.argv[2] if len(sys.argv) > 2 else None
    sys.exit(asyncio.run(main(url, version)))
