from booking_app.main import run

run()
