from portfolio_site import create_app
from portfolio_site.config import Config

app = create_app()

if __name__ == '__main__':
    app.run(port=Config.PORT)
