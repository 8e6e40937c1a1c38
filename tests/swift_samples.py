"""Swift sources and project builders used across the test suite."""

APP_DELEGATE = """import UIKit

@main
class AppDelegate: UIResponder, UIApplicationDelegate {

    func application(_ application: UIApplication, didFinishLaunchingWithOptions launchOptions: [UIApplication.LaunchOptionsKey: Any]?) -> Bool {
        // Override point for customization after application launch.
        return true
    }
}
"""

SWIFTUI_APP = """import SwiftUI

@main
struct WeatherApp: App {
    var body: some Scene {
        WindowGroup {
            ContentView()
        }
    }
}
"""

SWIFTUI_APP_WITH_INIT = """import SwiftUI
import Firebase

@main
struct WeatherApp: App {
    init() {
        FirebaseApp.configure()
    }

    var body: some Scene {
        WindowGroup {
            ContentView()
        }
    }
}
"""

CONTENT_VIEW = """import SwiftUI

struct ContentView: View {
    var body: some View {
        Text("Hello")
    }
}
"""


def make_project(root, files, bundle="Weather.xcodeproj"):
    """Create an Xcode-style project: a bundle directory plus the given files."""
    if bundle:
        (root / bundle).mkdir(parents=True, exist_ok=True)
        (root / bundle / "project.pbxproj").write_text("// !$*UTF8*$!\n")
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root
