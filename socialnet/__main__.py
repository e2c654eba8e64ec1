# socialnet/__main__.py

import uvicorn
from socialnet.core.config import HOST, PORT


def main():
    uvicorn.run("socialnet.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
