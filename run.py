from yelpcamp import create_app

# This is the entry point for the application.
# It creates the Flask app instance using the factory from the yelpcamp package.
app = create_app()

if __name__ == '__main__':
    # 'debug=True' allows for hot-reloading when you save changes.
    app.run(port=3000, debug=True)
