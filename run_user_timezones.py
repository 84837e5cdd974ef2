#!/usr/bin/env python3
"""
User Timezones - Web Service Entry Point

Run this script to start the service:
    python3 run_user_timezones.py

Then try: curl http://127.0.0.1:8083/timezones
"""

from flask_app import create_app
import os

app = create_app(os.getenv('FLASK_CONFIG', 'development'))

if __name__ == '__main__':
    host = app.config['HOST']
    port = app.config['PORT']

    print("\n" + "="*60)
    print("🕒 User Timezones Service")
    print("="*60)
    print(f"\n🌐 Server started on {host}:{port}")
    print("\n💡 Press CTRL+C to stop the server\n")

    app.run(debug=app.config['DEBUG'], host=host, port=port, threaded=True)
