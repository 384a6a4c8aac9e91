"""
Run the API with uvicorn, e.g. `mainstreet-admin` after installing the package.
"""
import uvicorn
from mainstreet_admin.core.config import settings

def main():
    uvicorn.run(
        "mainstreet_admin.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
    )

if __name__ == "__main__":
    main()
