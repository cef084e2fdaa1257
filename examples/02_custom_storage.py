"""
Custom storage and configuration
"""
import asyncio

from b2fs import Bootstrap, APIConfig, MemorySession, CredentialCache, TimeoutConfig


async def main():
    # Method 1: keep the session in memory only (nothing written to disk)
    bootstrap = Bootstrap("b2fs.yml", storage=MemorySession())
    session = await bootstrap.run()
    print(session)
    
    # Method 2: explicit cache directory and a request timeout
    config = APIConfig(timeout=TimeoutConfig(total=30))
    bootstrap = Bootstrap(
        "b2fs.yml",
        storage=CredentialCache("/var/cache/b2fs"),
        api_config=config
    )
    session = await bootstrap.run()
    print(session)
    
    # Forget the cached session
    bootstrap.storage.delete()


if __name__ == "__main__":
    asyncio.run(main())
