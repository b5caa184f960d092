#!/usr/bin/env python3
"""
Startup script for the Policy Fund Matching Engine
"""
import subprocess
import sys
from pathlib import Path

def create_env_file():
    """Create .env file if it doesn't exist"""
    env_path = Path(".env")
    if not env_path.exists():
        print("📝 Creating .env file...")

        env_content = """# Application Configuration
APP_NAME=Policy Fund Matching Engine
APP_VERSION=1.0.0
DEBUG=true
LOG_LEVEL=INFO

# API Configuration
API_PREFIX=/api/v1
CORS_ORIGINS=http://localhost:3000,http://localhost:8080

# Matching run defaults
DEFAULT_TOP_N=5
DEFAULT_MIN_SCORE=50
MAX_PER_INSTITUTION=2
"""

        with open(env_path, 'w', encoding='utf-8') as f:
            f.write(env_content)

        print("✅ .env file created successfully!")
    else:
        print("✅ .env file already exists")

def check_dependencies():
    """Check if required dependencies are installed"""
    print("🔍 Checking dependencies...")

    try:
        import fastapi
        import uvicorn
        import pydantic
        import pydantic_settings
        print("✅ All Python dependencies are installed")
        return True
    except ImportError as e:
        print(f"❌ Missing dependency: {e}")
        print("📦 Please install dependencies using: pip install -e .")
        return False

def check_catalog():
    """Load the seed fund catalog and report data-quality defects"""
    print("📚 Loading fund catalog...")

    try:
        from policy_fund.catalog import default_catalog
    except Exception as e:
        print(f"❌ Failed to load catalog: {e}")
        return False

    print(f"✅ {len(default_catalog)} funds loaded")
    for defect in default_catalog.defects:
        print(f"⚠️  Skipped fund {defect.fund_id}: {'; '.join(defect.errors)}")
    return not default_catalog.defects

def run_tests():
    """Run the test suite"""
    print("🧪 Running tests...")

    try:
        result = subprocess.run([sys.executable, '-m', 'pytest', '-q', 'tests'], capture_output=True, text=True)
        if result.returncode == 0:
            print("✅ Tests passed successfully")
            return True
        else:
            print(f"❌ Tests failed:\n{result.stdout}")
            return False
    except Exception as e:
        print(f"❌ Failed to run tests: {e}")
        return False

def start_application():
    """Start the FastAPI application"""
    print("🚀 Starting the application...")

    try:
        subprocess.run([
            sys.executable, '-m', 'uvicorn',
            'policy_fund.main:app',
            '--host', '0.0.0.0',
            '--port', '8000',
            '--reload'
        ])
    except KeyboardInterrupt:
        print("\n👋 Application stopped by user")
    except Exception as e:
        print(f"❌ Failed to start application: {e}")

def main():
    """Main startup function"""
    print("🏦  Policy Fund Matching Engine")
    print("=" * 50)

    # Check if we're in the right directory
    if not Path("policy_fund").exists():
        print("❌ Please run this script from the project root directory")
        sys.exit(1)

    # Create .env file
    create_env_file()

    # Check dependencies
    if not check_dependencies():
        print("\n📦 Please install dependencies first:")
        print("   pip install -e .[test]")
        sys.exit(1)

    if not check_catalog():
        print("\n⚠️  Some fund records were skipped. Matching runs over the remaining funds.")

    # Run tests
    if not run_tests():
        print("\n⚠️  Some tests failed. The application may not work correctly.")

    print("\n🎯 System is ready!")
    print("\n📚 Next steps:")
    print("1. Visit http://localhost:8000/docs for API documentation")
    print("2. Browse the catalog using the /api/v1/funds endpoints")
    print("3. Classify funds for a company using POST /api/v1/matching/classify")

    # Ask if user wants to start the application
    response = input("\n🚀 Start the application now? (y/n): ").lower().strip()
    if response in ['y', 'yes']:
        start_application()
    else:
        print("\n💡 To start the application later, run:")
        print("   uvicorn policy_fund.main:app --reload")

if __name__ == "__main__":
    main()
